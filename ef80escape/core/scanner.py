"""Strict UTF-8 scanner.

Decodes a single shortest-form UTF-8 sequence at a given offset. Anything
the Unicode standard rejects is reported as "not decodable here": stray
continuation bytes, overlong forms, surrogates (U+D800..U+DFFF), values above
U+10FFFF and sequences cut off by the end of the buffer.
"""

# Lead byte -> (continuation count, payload mask, allowed range for the
# second byte). Only the second byte's range varies; later continuation
# bytes are always 0x80..0xBF. Lead bytes missing from the table (0x80..0xC1,
# 0xF5..0xFF) never start a valid sequence.
_CONT_LO = 0x80
_CONT_HI = 0xBF


def _lead_table() -> dict[int, tuple[int, int, int, int]]:
    table: dict[int, tuple[int, int, int, int]] = {}
    for lead in range(0xC2, 0xE0):
        table[lead] = (1, 0x1F, _CONT_LO, _CONT_HI)
    for lead in range(0xE0, 0xF0):
        table[lead] = (2, 0x0F, _CONT_LO, _CONT_HI)
    for lead in range(0xF0, 0xF5):
        table[lead] = (3, 0x07, _CONT_LO, _CONT_HI)
    table[0xE0] = (2, 0x0F, 0xA0, _CONT_HI)  # No overlong 3-byte forms
    table[0xED] = (2, 0x0F, _CONT_LO, 0x9F)  # No surrogates
    table[0xF0] = (3, 0x07, 0x90, _CONT_HI)  # No overlong 4-byte forms
    table[0xF4] = (3, 0x07, _CONT_LO, 0x8F)  # Nothing above U+10FFFF
    return table


_LEADS = _lead_table()


def scan_utf8(data: bytes, offset: int = 0) -> tuple[int, int] | None:
    """Decode one UTF-8 sequence starting at offset.

    Args:
        data: Buffer to read from.
        offset: Index of the first byte of the candidate sequence.

    Returns:
        (code_point, consumed) where consumed is 1..4, or None if no valid
        shortest-form sequence starts at offset (including offset at or past
        the end of data).
    """
    length = len(data)
    if offset < 0 or offset >= length:
        return None

    lead = data[offset]
    if lead < 0x80:
        return lead, 1

    entry = _LEADS.get(lead)
    if entry is None:
        return None
    needed, mask, second_lo, second_hi = entry

    # Truncated at the end of the buffer
    if offset + needed >= length:
        return None

    second = data[offset + 1]
    if not second_lo <= second <= second_hi:
        return None
    code_point = ((lead & mask) << 6) | (second & 0x3F)

    for index in range(offset + 2, offset + needed + 1):
        byte = data[index]
        if not _CONT_LO <= byte <= _CONT_HI:
            return None
        code_point = (code_point << 6) | (byte & 0x3F)

    return code_point, needed + 1
