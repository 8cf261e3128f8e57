"""ReQube: convert ReSharper InspectCode reports to SonarQube external issues."""

__version__ = "1.0.0"
