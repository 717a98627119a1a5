import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Console formatter with colors for different log levels"""
    
    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'
    BOLD = '\033[1m'
    
    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{self.BOLD}{levelname}{self.RESET}"
        
        result = super().format(record)
        
        # Reset levelname for other handlers
        record.levelname = levelname
        
        return result


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure console logging for the application.
    
    Safe to call more than once: the handler is only installed the first time.
    Returns the "tracker_app" package logger.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_tracker_handler", False) for h in root.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt='%H:%M:%S'))
        console_handler._tracker_handler = True
        root.addHandler(console_handler)
    root.setLevel(level.upper())
    
    # Reduce noise from other libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    
    return logging.getLogger("tracker_app")
