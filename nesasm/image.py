from typing import Iterable, TextIO

from .bytes import ByteConverter
from .errors import ProgramTooLargeError

PRG_SIZE = 0x1000
VECTOR_OFFSET = 0xFFA # reset vector, then four zero bytes for NMI and IRQ/BRK


def build_binary(chunks: Iterable[bytes]) -> bytes:
    return b"".join(chunks)


def build_rom(data: bytes, origin: int) -> bytes:
    """Pad a program to a 4 KiB PRG image and append the interrupt vectors.

    The image ends with ``origin`` as a little-endian reset vector followed
    by four zero bytes for the remaining vectors.
    """
    if len(data) > VECTOR_OFFSET:
        raise ProgramTooLargeError(len(data))

    image = bytearray(data)
    image += bytes(VECTOR_OFFSET - len(data))
    image += ByteConverter.convert_int(origin, 2)
    image += bytes(4)
    return bytes(image)


def write_hex_output(origin: int, data: bytes, f: TextIO):
    # 16 bytes per line: 'ADDRESS: B1 B2 ...'
    for i in range(0, len(data), 16):
        chunk = data[i:i+16]
        addr = origin + i
        hex_bytes = " ".join(f"{b:02X}" for b in chunk)
        f.write(f"{addr:04X}: {hex_bytes}\n")
