"""Default configuration values."""

DEFAULT_PALETTE_YAML = """
palette:
  - name: red
    rgb: "FF6961"
  - name: green
    rgb: "86C21D"
  - name: orange
    rgb: "F0A04B"
  - name: blue
    rgb: "86B0BD"
  - name: pink
    rgb: "FFA4A4"
  - name: purple
    rgb: "CBA6F7"
"""
