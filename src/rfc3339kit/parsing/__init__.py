"""Parsing layer — cursor-based rules that build domain values.

Rules raise ``ParseFailure`` internally. Callers outside this package
use :func:`rfc3339kit.services.parse.parse_datetime`, which never raises.
"""
