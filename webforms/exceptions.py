class FormError(Exception):
    """Erro base do pacote webforms."""


class ConfigurationError(FormError):
    """Opções ou campos configurados de forma inválida."""


class EncryptionError(FormError):
    """Falha ao gerar o hash de uma senha."""
