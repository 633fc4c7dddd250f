"""
Centralized constants for Vademecum PDF.
Runtime magic numbers that are not page geometry live here.
"""

# ===========================================
# APPLICATION
# ===========================================
APP_VERSION = '1.0.0'

# ===========================================
# EXPORT
# ===========================================
DOCUMENT_EXTENSION = '.pdf'
FILE_NAME_SEPARATOR = '-'

# ===========================================
# TABLE OF CONTENTS
# ===========================================
TOC_MODES = ('exact', 'estimate')
TOC_ESTIMATED_PAGES_PER_LAW = 2       # heuristic page span per law

# ===========================================
# CONTINUATION MARKERS
# ===========================================
CONTINUATION_MODES = ('long_only', 'always')

# ===========================================
# LANGUAGES
# ===========================================
SUPPORTED_LANGUAGES = ('pt', 'en')
DEFAULT_LANGUAGE = 'pt'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/vademecum.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
