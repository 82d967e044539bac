from .log import SessionLog, is_blank, is_input_valid

__all__ = ["SessionLog", "is_blank", "is_input_valid"]
