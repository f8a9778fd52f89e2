
class ByteConverter:

  @staticmethod
  def convert_int(value: int, size: int) -> bytes:
    if size == 1:
      return bytes([value & 0xFF])
    elif size == 2:
      # little endian
      return bytes([value & 0xFF, (value >> 8) & 0xFF])
    else:
      raise ValueError(f"Invalid size: {size}")

  @staticmethod
  def word_fits(value: int) -> bool:
    return 0 <= value <= 0xFFFF

  @staticmethod
  def byte_fits(value: int) -> bool:
    return 0 <= value <= 0xFF
