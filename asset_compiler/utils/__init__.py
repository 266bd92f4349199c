# Asset compiler utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, print_summary, get_counts
