"""Static lookup tables shared by the mapper and the solution parser."""

#: Engine identifier reported to SonarQube for every imported issue
ENGINE_ID = "ReSharper"

#: SonarQube issue type used for every imported issue
CODE_SMELL_TYPE = "CODE_SMELL"

#: ReSharper severity -> SonarQube severity
RESHARPER_TO_SONARQUBE_SEVERITY: dict[str, str] = {
    "ERROR":      "CRITICAL",
    "WARNING":    "MAJOR",
    "SUGGESTION": "MINOR",
    "HINT":       "INFO",
}

#: Visual Studio project type label -> project type GUID (as written in .sln files)
PROJECT_TYPE_GUIDS: dict[str, str] = {
    "C#":              "{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}",
    "C# (SDK)":        "{9A19103F-16F7-4668-BE54-9A1E7A4F7556}",
    "VB.NET":          "{F184B08F-C81C-45F6-A57F-5ABD9991F28F}",
    "F#":              "{F2A71F9B-5D33-465A-A702-920D77279786}",
    "Web Site":        "{E24C65DC-7377-472B-9ABA-BC803B73C61A}",
    "Solution Folder": "{2150E333-8FDC-42A3-9474-1A3956D46DE8}",
}

SOLUTION_FOLDER_GUID = PROJECT_TYPE_GUIDS["Solution Folder"]
