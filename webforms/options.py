"""
Registros de opções por tipo de campo.

Cada campo recebe um registro tipado com valores padrão. Dicionários com as
mesmas chaves continuam aceitos e são convertidos por ``from_value``:

    EmailField('a@b.co', {'blank': True})
    EmailField('a@b.co', EmailOptions(blank=True))
"""

import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Sequence, Union

from webforms import settings
from webforms.exceptions import ConfigurationError
from webforms.utils.logger import Logger

Expression = Union[str, re.Pattern, None]


@dataclass
class FieldOptions:
    _logger = Logger("FieldOptions")

    blank: Optional[bool] = None

    @classmethod
    def from_value(cls, options=None) -> 'FieldOptions':
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, FieldOptions):
            return cls.from_dict({f.name: getattr(options, f.name) for f in fields(options)})
        if isinstance(options, dict):
            return cls.from_dict(options)
        raise ConfigurationError(
            f"{cls.__name__} espera um dict ou {cls.__name__}, recebeu {type(options).__name__}"
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldOptions':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            cls._logger.debug(f"Opções ignoradas em {cls.__name__}: {sorted(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass
class EmailOptions(FieldOptions):
    expression: Expression = None


@dataclass
class PasswordOptions(FieldOptions):
    salt: Optional[str] = ''
    algorithm: Optional[str] = settings.DEFAULT_ALGORITHM

    def __post_init__(self):
        # valores vazios voltam ao padrão
        self.salt = self.salt or ''
        self.algorithm = self.algorithm or settings.DEFAULT_ALGORITHM


@dataclass
class UserOptions(FieldOptions):
    expression: Expression = None


@dataclass
class URLOptions(FieldOptions):
    absolute: bool = False
    expression: Expression = None

    def __post_init__(self):
        self.absolute = self.absolute is True


@dataclass
class ChoiceOptions(FieldOptions):
    choices: Optional[Sequence[Any]] = field(default_factory=list)

    def __post_init__(self):
        if self.choices is None:
            self.choices = []
