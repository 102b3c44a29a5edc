import re

from .errors import ArgumentError, CodeParseError

ARRAY_NAME = "myImage"
VALUES_PER_LINE = 40

BYTE_TOKEN = re.compile(r"(?:0[xX])?[0-9A-Fa-f]{1,2}")


def parse_code(lines, path="<code>"):
    """Collect the byte values of every line that starts with ``0x``.

    Anything else (the declaration, the closing brace, comments) is ignored.
    """
    result = bytearray()

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line.startswith("0x"):
            continue

        for token in line.split(","):
            token = token.strip()
            if not token:
                continue
            if not BYTE_TOKEN.fullmatch(token):
                raise CodeParseError(path, line_number, token)
            result.append(int(token, 16))

    return bytes(result)


def read_code_file(path):
    # utf-8-sig so files saved with a BOM still have their first line seen;
    # undecodable bytes can never form a 0x token, so replace them
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        return parse_code(f, path=str(path))


def format_code(data, name=ARRAY_NAME):
    if not data:
        raise ArgumentError("Empty value.", "data")

    parts = [f"static const unsigned char {name}[{len(data)}] = {{\n"]
    for i, byte in enumerate(data):
        parts.append(f"0x{byte:02X}")
        if i + 1 < len(data):
            parts.append(", ")
        # wrap after every 40th value, the last one included
        if (i + 1) % VALUES_PER_LINE == 0:
            parts.append("\n")
    parts.append("\n")
    parts.append("};\n")

    return "".join(parts)


def write_code_file(data, path):
    text = format_code(data)

    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
