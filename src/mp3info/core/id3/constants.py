from __future__ import annotations

ID3V1_MARKER = b"TAG"
ID3V1_SIZE = 128
ID3V1_UNDEFINED_GENRE = 255

ID3V2_MARKER = b"ID3"
ID3V2_HEADER_SIZE = 10
ID3V2_FOOTER_SIZE = 10
ID3V2_FRAME_HEADER_SIZE = 10
ID3V2_PADDING_ID = b"\x00\x00\x00\x00"

ENCODING_LATIN1 = 0x00
ENCODING_UTF16 = 0x01
ENCODING_UTF16BE = 0x02
ENCODING_UTF8 = 0x03
