"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - conversation over input
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

#main {
    height: 1fr;
    padding: 0 1;
}

/* ============================================
   Welcome Panel - shown while the chat is empty
   ============================================ */
#welcome {
    height: 1fr;
    align: center middle;
    padding: 1 2;
}

#welcome-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $primary;
    margin-bottom: 1;
}

#welcome-subtitle {
    width: 100%;
    text-align: center;
    color: $text-muted;
    margin-bottom: 1;
}

#suggestions {
    height: auto;
    layout: grid;
    grid-size: 2;
    grid-gutter: 1 2;
    padding: 1 4;
}

SuggestionCard {
    width: 100%;
    height: 4;
    border: round $primary 60%;
    background: $surface;
    color: $foreground;

    &:hover {
        border: round $primary;
        background: $primary 12%;
    }

    &:focus {
        border: round $accent;
        text-style: bold;
    }
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

/* User messages - primary accent, offset to the right */
.user-message {
    border-right: tall $primary;
    background: $primary 10%;
    margin-left: 8;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    &:hover {
        background: $primary 15%;
    }
}

/* Assistant messages - secondary accent */
.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;
    margin-right: 8;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &:hover {
        background: $secondary 12%;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Thinking Indicator
   ============================================ */
#thinking {
    height: 1;
    padding: 0 2;
    color: $secondary;
    text-style: italic;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    margin: 0 1;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }

    &.-busy {
        border: round $warning 60%;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    background: $primary;
    color: $background;
    text-style: bold;

    &:hover {
        background: $primary-lighten-1;
    }
}

#input-hint {
    height: 1;
    margin: 0 2;
    color: $text-muted;
    text-align: center;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
}
"""
