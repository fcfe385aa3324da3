"""
Global constants for the NewRial converter.
Keep ONLY pure constants here (no heavy imports / logic).
"""

# --- Redenomination factors (old Rial based) ---
OLD_PER_NEW = 10_000     # 10,000 old Rial = 1 new Rial
OLD_PER_QERAN = 100      # 100 old Rial = 1 Qeran
RIAL_PER_TOMAN = 10      # 10 old Rial = 1 (old) Toman
QERAN_MAX = 99           # Qeran never reaches a whole new Rial
QERAN_INPUT_DIGITS = 2   # the qeran field holds at most two digits

# --- Languages ---
DEFAULT_LANG = "fa"
SUPPORTED_LANGS = ("fa", "en")

# --- Environment overrides (read by SettingsManager) ---
ENV_PREFIX = "NEWRIAL_"
ENV_LANG = ENV_PREFIX + "LANG"
ENV_REVERSE = ENV_PREFIX + "REVERSE"
ENV_LOG_LEVEL = ENV_PREFIX + "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
