from abc import ABC, abstractmethod


class AbstractField(ABC):
    def __init__(self, value, options):
        self.value = value
        self.options = options

    @abstractmethod
    def validate(self) -> bool:
        """Retorna True se o valor atual satisfaz as regras do campo."""
        pass


class AbstractEncryptedField(AbstractField):
    @abstractmethod
    def encrypt(self) -> str:
        pass
