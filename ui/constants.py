# Page texts
APP_TITLE = "Code Learning Assistant"
FOOTER_TEXT = (
    "Code Learning Assistant - Built for educational purposes\n\n"
    "Works completely offline • Lightweight • Beginner-friendly"
)

# Tab identifiers and titles, in display order
VIEW_TITLES = {
    "editor": "Code Editor",
    "exercises": "Exercises",
    "tutorials": "Tutorials",
    "dashboard": "Dashboard",
}

# Color palette for the analysis panel
SUCCESS_COLOR = "#166534"  # Status line, success
ERROR_COLOR = "#991B1B"    # Status line, error
STYLE_COLOR = "#A16207"
LOGIC_COLOR = "#1D4ED8"
HINT_COLOR = "#7E22CE"

# Section headings of the analysis panel
STYLE_HEADING = "Style Suggestions:"
LOGIC_HEADING = "Logic Considerations:"
HINTS_HEADING = "Debugging Hints:"

CODE_PLACEHOLDER = "Write your Python code here..."
