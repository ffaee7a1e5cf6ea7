"""
Centralized constants for AIO Translator.
Fixed tables shared by the post-processing passes and logging.
"""

# ===========================================
# PUNCTUATION REPAIR
# ===========================================
SENTENCE_MARKS = ".,;!?"              # marks the spacing passes act on

# ASCII punctuation code point ranges (inclusive)
ASCII_PUNCTUATION_RANGES = (
    (33, 47),     # ! " # $ % & ' ( ) * + , - . /
    (58, 64),     # : ; < = > ? @
    (91, 96),     # [ \ ] ^ _ `
    (123, 126),   # { | } ~
)

# Unicode general categories
PUNCTUATION_CATEGORIES = frozenset({"Pe", "Pc", "Pd", "Pf", "Pi", "Ps", "Po"})
CONTROL_CATEGORIES = frozenset({"Cc", "Cf"})
NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})
SPACE_SEPARATOR_CATEGORY = "Zs"

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
ROOT_LOGGER_NAME = 'aio_translator'
