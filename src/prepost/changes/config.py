"""
Configuration for change-set detection.
"""

GIT_CONFIG = {
    "compare_against": "HEAD",  # Default diff target
    "include_staged": True,
    "include_unstaged": True,
    "include_untracked": True,  # Untracked files not excluded by .gitignore
    "timeout_seconds": 10,
}
