import re
from collections.abc import Sequence


def as_text(value) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def compile_expression(expression, default: str):
    """Aceita uma string ou um padrão já compilado."""
    if expression is None:
        return re.compile(default)
    if isinstance(expression, re.Pattern):
        return expression
    return re.compile(expression)


class Validator:
    def validate(self, value):
        raise NotImplementedError

    def is_valid(self, value) -> bool:
        try:
            self.validate(value)
        except (ValueError, TypeError):
            return False
        return True


class RequiredValidator(Validator):
    """Rejeita apenas a string vazia; None e outros valores passam."""

    def validate(self, value):
        if value == '':
            raise ValueError("Campo obrigatório")
        return True


class LengthValidator(Validator):
    def __init__(self, min_length=None, max_length=None):
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, value):
        if value is None:
            raise ValueError("Valor ausente")

        if not hasattr(value, "__len__"):
            raise TypeError("Valor não suporta validação de comprimento")

        if self.min_length is not None and len(value) < self.min_length:
            raise ValueError(f"Comprimento mínimo é {self.min_length}")

        if self.max_length is not None and len(value) > self.max_length:
            raise ValueError(f"Comprimento máximo é {self.max_length}")

        return True


class FormatValidator(Validator):
    """
    Procura o padrão em qualquer posição do valor (re.search).
    Padrões que precisam casar o valor inteiro devem usar ^ e \\Z.
    """

    def __init__(self, pattern, default: str = None):
        self.pattern = compile_expression(pattern, default)

    def validate(self, value):
        if not self.pattern.search(as_text(value)):
            raise ValueError("Formato inválido")
        return True


class InclusionValidator(Validator):
    def __init__(self, valid_values):
        self.valid_values = valid_values

    def validate(self, value):
        choices = self.valid_values
        if not isinstance(choices, Sequence) or isinstance(choices, (str, bytes)):
            raise TypeError("Escolhas devem ser uma sequência")
        if len(choices) == 0:
            raise ValueError("Nenhuma escolha configurada")
        # igualdade estrita: True não casa com 1 nem 0 com False
        if not any(type(choice) is type(value) and choice == value for choice in choices):
            raise ValueError(f"Valor deve estar entre: {', '.join(str(v) for v in choices)}")
        return True
