# objmesh/loader/diagnostics.py
# -*- coding: utf-8 -*-
"""
Диагностика парсера: фатальная ошибка и приёмник предупреждений.

* ObjParseError – прерывает разбор документа целиком.
* Diagnostics   – собирает предупреждения и пробрасывает их в логгер,
                  чтобы они не терялись.
"""

from typing import Callable, List, NamedTuple, Optional

from objmesh.utils.logger import logger


class ObjParseError(ValueError):
    """Фатальная ошибка разбора: номер строки (с 0), токен и причина."""

    def __init__(self, line: int, reason: str, token: Optional[str] = None):
        super().__init__(f"At line {line}: {reason}")
        self.line = line
        self.reason = reason
        self.token = token


class ParseWarning(NamedTuple):
    line: Optional[int]     # None – предупреждение относится ко всему мешу
    message: str

    def __str__(self):
        if self.line is None:
            return f"Warning: {self.message}"
        return f"At line {self.line}: {self.message}"


class Diagnostics:
    """
    Приёмник предупреждений.

    Каждое предупреждение сохраняется в ``warnings``, пишется в логгер
    пакета и, если задан, передаётся в ``callback``.
    """

    def __init__(self, callback: Optional[Callable[[ParseWarning], None]] = None):
        self.warnings: List[ParseWarning] = []
        self.callback = callback

    def warn(self, line: Optional[int], message: str) -> ParseWarning:
        warning = ParseWarning(line, message)
        self.warnings.append(warning)
        logger.warning(f"[Parser] {warning}")
        if self.callback is not None:
            self.callback(warning)
        return warning

    def messages(self) -> List[str]:
        return [w.message for w in self.warnings]

    def __len__(self):
        return len(self.warnings)

    def __iter__(self):
        return iter(self.warnings)
