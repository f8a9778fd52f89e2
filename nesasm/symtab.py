import logging

logger = logging.getLogger(__name__)

class SymbolTable:
  """Label name -> address. Names are case-sensitive."""

  def __init__(self):
    self.symbols : dict[str, int] = {}

  def items(self):
    return self.symbols.items()

  def define(self, name: str, value: int):
    # Redefinition keeps the last address seen
    if name in self.symbols:
      logger.warning("Label '%s' redefined: 0x%04X -> 0x%04X", name, self.symbols[name], value)
    self.symbols[name] = value

  def get(self, name: str) -> int | None:
    return self.symbols.get(name)

  def __getitem__(self, name: str) -> int:
    return self.symbols[name]

  def __contains__(self, name: str) -> bool:
    return name in self.symbols

