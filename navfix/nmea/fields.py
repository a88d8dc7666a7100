"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Every parser returns None for an empty or malformed field, and
decoders skip the assignment on None: a field the receiver left blank or sent
garbled keeps whatever value the fix record already held.
"""


# Supported NMEA talker prefixes, including the leading '$'.
# Each 2-character talker ID identifies the satellite system:
#   GP = GPS (USA)
#   GL = GLONASS (Russia)
#   GN = Multi-GNSS (combined solution)
#   GA = Galileo (Europe)
TALKER_PREFIXES = ("$GP", "$GL", "$GN", "$GA")

# RMC / GLL status field
_STATUS_ACTIVE = "A"
_STATUS_VOID = "V"


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a non-negative integer field, returning None if empty or invalid.

    Used for counts such as the number of satellites, which are never
    negative; a negative value is treated as malformed.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    if number < 0:
        return None
    return number


def parse_direction_field(value: str, positive: str, negative: str) -> bool | None:
    """Parse a hemisphere indicator into a flag.

    Args:
        value: Hemisphere field, e.g. "N"
        positive: Indicator mapped to True ("N" or "E")
        negative: Indicator mapped to False ("S" or "W")

    Returns:
        True for the positive indicator, False for the negative one,
        None for anything else (including an empty field)

    Example:
        >>> parse_direction_field("S", "N", "S")
        False
    """
    if value == positive:
        return True
    if value == negative:
        return False
    return None


def parse_status_field(value: str) -> bool | None:
    """Parse an RMC/GLL status field: 'A' (active) or 'V' (void)."""
    if value == _STATUS_ACTIVE:
        return True
    if value == _STATUS_VOID:
        return False
    return None


def update_field(record: object, name: str, value: object | None) -> None:
    """Write value to record.name unless the field failed to parse."""
    if value is not None:
        setattr(record, name, value)


def update_position(record: object, tokens: list[str], index: int) -> None:
    """Write the four position fields that start at tokens[index].

    RMC, GGA and GLL all carry the same run of fields, only at different
    offsets:

        tokens[index]     -> latitude (DDMM.MMMM)
        tokens[index + 1] -> N/S
        tokens[index + 2] -> longitude (DDDMM.MMMM)
        tokens[index + 3] -> E/W

    Coordinates are stored in packed form; see FixRecord.latitude_degrees
    for decimal degrees.
    """
    update_field(record, "latitude", parse_float_field(tokens[index]))
    update_field(
        record,
        "latitude_is_north",
        parse_direction_field(tokens[index + 1], "N", "S"),
    )
    update_field(record, "longitude", parse_float_field(tokens[index + 2]))
    update_field(
        record,
        "longitude_is_east",
        parse_direction_field(tokens[index + 3], "E", "W"),
    )


def parse_fixed_width(value: str, start: int, width: int = 2) -> int | None:
    """Parse a fixed-width numeric slice of a field.

    NMEA packs time (HHMMSS.ss) and date (DDMMYY) into single fields, so
    their components are read by position rather than by delimiter.

    Example:
        >>> parse_fixed_width("091724.00", 2)  # minutes
        17
    """
    piece = value[start : start + width]
    if len(piece) != width or not (piece.isascii() and piece.isdigit()):
        return None
    return int(piece)
