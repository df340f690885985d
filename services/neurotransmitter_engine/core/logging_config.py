import logging
import sys
from typing import Optional, TextIO
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "neurotransmitter-engine"

class AssessmentJsonFormatter(jsonlogger.JsonFormatter):
    """JSON log lines tagged with the service name, level and source location."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        log_record['level'] = (log_record.get('level') or record.levelname).upper()
        log_record['service'] = SERVICE_NAME
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures structured JSON logging on the root logger.

    Calling it again only adjusts the level; a second JSON handler is never added.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    existing = [h for h in root_logger.handlers if isinstance(h.formatter, AssessmentJsonFormatter)]
    if existing:
        root_logger.debug(f"JSON logging already configured; level set to {logging.getLevelName(log_level)}")
        return root_logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(AssessmentJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    root_logger.addHandler(handler)
    root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
    return root_logger
