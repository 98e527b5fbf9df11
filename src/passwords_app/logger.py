"""
Application logging.

Password plaintext never reaches the log, only lengths and kinds.
"""

import logging
from typing import Optional

from .errors import ConfigError

class AppLogger:
    """Log generator, hasher and analyzer activity."""
    
    def __init__(self, log_file: Optional[str] = None, level: int = logging.INFO):
        self.logger = logging.getLogger('passwords_app')
        self.logger.setLevel(level)
        self.configure(log_file, level)
    
    def configure(self, log_file: Optional[str] = None, level: int = logging.INFO):
        """Replace handlers, writing to ``log_file`` when one is given."""
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()
        self.logger.setLevel(level)
        
        if not log_file:
            self.logger.addHandler(logging.NullHandler())
            return
        
        # File handler
        try:
            fh = logging.FileHandler(log_file)
        except OSError as e:
            self.logger.addHandler(logging.NullHandler())
            raise ConfigError(f"Cannot open log file {log_file}: {e}")
        fh.setLevel(level)
        
        # Formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        fh.setFormatter(formatter)
        
        self.logger.addHandler(fh)
    
    def log_generation(self, kind: str, length: int):
        """Log a generated password."""
        self.logger.info(f"Generated {kind} password of length {length}")
    
    def log_hash(self, algorithm: str, success: bool):
        """Log a digest computation."""
        status = "SUCCESS" if success else "FAILED"
        self.logger.info(f"Hash {algorithm} - {status}")
    
    def log_analysis(self, length: int, score: float):
        """Log a password analysis."""
        self.logger.info(f"Analyzed password of length {length}, score {score:.0f}")
    
    def log_event(self, event: str, details: str = ""):
        """Log general application events."""
        details_str = f" - {details}" if details else ""
        self.logger.warning(f"Event: {event}{details_str}")

# Global logger instance
app_logger = AppLogger()
