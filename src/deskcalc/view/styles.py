"""Qt stylesheets for the calculator window."""

WINDOW_STYLE = "background-color: #FFFFFF;"

DISPLAY_STYLE = """
    background-color: #000000;
    color: white;
    border-radius: 25px;
    font-size: 32px;
    padding: 10px;
    border: none;
"""

_BUTTON_TEMPLATE = """
    QPushButton {{
        background: {background};
        color: white;
        border-radius: 25px;
        font-size: 20px;
        font-weight: bold;
        border: none;
        padding: 10px;
    }}
    QPushButton:hover {{ background-color: #444444; }}
    QPushButton:pressed {{ background-color: #222222; }}
"""

BUTTON_STYLE = _BUTTON_TEMPLATE.format(background="#000000")

EQUALS_BUTTON_STYLE = _BUTTON_TEMPLATE.format(
    background="qlineargradient(x1: 0, y1: 0, x2: 1, y2: 1, stop: 0 #121393, stop: 1 #0006ca)"
)
