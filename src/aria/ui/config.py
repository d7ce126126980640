"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Display names
ASSISTANT_NAME = "ARIA"
USER_NAME = "You"
APP_SUBTITLE = "Adaptive Reasoning & Intelligence Assistant"

# Timestamps
MESSAGE_TIME_FORMAT = "%H:%M"
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100

# Toast durations (seconds)
NOTIFY_TIMEOUT = 3
COPY_NOTIFY_TIMEOUT = 2

# Themes
THEME_DARK = "aria-dark"
THEME_LIGHT = "aria-light"

# Welcome screen suggestions: (title, description, prompt)
SUGGESTIONS = (
    (
        "Code Help",
        "Help me debug my JavaScript code",
        "Can you help me debug a JavaScript function that's not working properly?",
    ),
    (
        "Creative Ideas",
        "Brainstorm ideas for my project",
        "I need creative ideas for a web development project. Can you help me brainstorm?",
    ),
    (
        "Learning",
        "Explain complex concepts simply",
        "Can you explain how machine learning works in simple terms?",
    ),
    (
        "Quick Answers",
        "Get instant answers to questions",
        "What are the latest trends in web development?",
    ),
)
