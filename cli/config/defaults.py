"""
Default CLI configuration values.
"""

DEFAULT_CONFIG_DIR = "~/.dotty"
DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_HISTORY_FILE = "~/.dotty/history"

DEFAULT_CONFIG_YAML = """\
# Dotty CLI configuration

converter:
  # Mode the REPL starts in: encode or decode
  default_mode: encode

ui:
  # default, dark, light, minimal, matrix
  theme: default
  show_patterns: true
  max_width: 100

session:
  history_file: ~/.dotty/history
  # Copy every result to the clipboard
  auto_copy: false

debug: false
no_color: false
"""
