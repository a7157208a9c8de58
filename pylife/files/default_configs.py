"""
    Just a DEFAULTS dictionary with the raw value used for each flag
    when it is absent from the command line. Values are given in the
    same textual form a user would type, and go through the same
    parsing and validation as user input.
"""


DEFAULTS = {
    "file": None,       # None -> the engine seeds its default pattern
    "steps": "0",       # 0 -> run forever
    "rate": "1.0",      # seconds between generations
    "height": "768",
    "width": "1024",
    "alive": "black",
    "dead": "white",
    "grid": False,
}
