import hashlib
from urllib.parse import quote

from webforms import settings
from webforms.abstract.abstract_field import AbstractField, AbstractEncryptedField
from webforms.exceptions import EncryptionError
from webforms.options import (
    FieldOptions, EmailOptions, PasswordOptions, UserOptions, URLOptions, ChoiceOptions
)
from webforms.utils.logger import Logger
from webforms.validator import (
    RequiredValidator, LengthValidator, FormatValidator, InclusionValidator, as_text
)

# Caracteres que encodeURI mantém sem escape, além de letras, dígitos e "_.-~"
URI_SAFE = ";,/?:@&=+$!*'()#"


class Field(AbstractField):
    """
    Campo básico de formulário.

    value: o dado enviado pelo formulário para este campo.
    options: opções desta instância. A opção 'blank' igual a False faz o
        campo falhar na validação quando o valor é a string vazia.
    """
    _logger = Logger("Field")
    options_class = FieldOptions

    def __init__(self, value=None, options=None):
        super().__init__(value, self.options_class.from_value(options))

    def validate(self) -> bool:
        if self.options.blank is False:
            return self._check(RequiredValidator())
        return True

    def _check(self, validator) -> bool:
        if validator.is_valid(self.value):
            return True
        self._logger.debug(f"{self.__class__.__name__} inválido")
        return False

    def __repr__(self):
        return f"{self.__class__.__name__}(value={self.value!r})"


class EmailField(Field):
    """
    Valida o valor como endereço de email. Aceita 'expression' como expressão
    regular própria. Só aceita valor vazio com blank=True explícito.
    """
    _logger = Logger("EmailField")
    options_class = EmailOptions

    def __init__(self, value=None, options=None):
        super().__init__(value, options)
        self.validator = FormatValidator(self.options.expression, settings.EMAIL_EXPRESSION)

    def validate(self) -> bool:
        if self.options.blank is True and self.value == '':
            return True
        return self._check(self.validator)


class PasswordField(Field, AbstractEncryptedField):
    """
    Senha. Por padrão o hash é sha512 sem salt; use 'salt' e 'algorithm'
    nas opções para mudar isso.
    """
    _logger = Logger("PasswordField")
    options_class = PasswordOptions

    def validate(self) -> bool:
        return self._check(LengthValidator(min_length=1))

    def encrypt(self) -> str:
        if not isinstance(self.value, str):
            self._logger.error(f"Senha com tipo inválido: {type(self.value).__name__}")
            raise EncryptionError(f"Senha deve ser uma string, recebeu {type(self.value).__name__}")

        try:
            data = (as_text(self.options.salt) + self.value).encode("utf-8")
        except UnicodeEncodeError as e:
            self._logger.error("Senha ou salt não pode ser codificado em UTF-8")
            raise EncryptionError(f"Senha ou salt inválido: {e}") from e

        try:
            return hashlib.new(self.options.algorithm, data).hexdigest()
        except (ValueError, TypeError) as e:
            self._logger.error(f"Algoritmo de hash inválido '{self.options.algorithm}'")
            raise EncryptionError(f"Algoritmo de hash inválido '{self.options.algorithm}': {e}") from e

    def __repr__(self):
        return f"{self.__class__.__name__}(value='***')"


class UserField(Field):
    """Nome de usuário: por padrão de 1 a 15 caracteres entre [a-zA-Z0-9@.+-_]."""
    _logger = Logger("UserField")
    options_class = UserOptions

    def __init__(self, value=None, options=None):
        super().__init__(value, options)
        self.validator = FormatValidator(self.options.expression, settings.USER_EXPRESSION)

    def validate(self) -> bool:
        return self._check(self.validator)


class SetPasswordFields(Field):
    """
    Par de senhas que precisam coincidir. As opções não são repassadas às
    senhas internas; para o hash use ``campo.password1.encrypt()``.
    """
    _logger = Logger("SetPasswordFields")

    def __init__(self, password1=None, password2=None, options=None):
        super().__init__(password1, options)
        self.password1 = PasswordField(password1)
        self.password2 = PasswordField(password2)

    def validate(self) -> bool:
        first = self.password1.value
        if isinstance(first, str) and len(first) > 0 and first == self.password2.value:
            return True
        self._logger.debug("Senhas vazias ou diferentes")
        return False

    def __repr__(self):
        return f"{self.__class__.__name__}(password1='***', password2='***')"


class CheckboxField(Field):
    """
    Após a inicialização o valor é True (marcado) ou False (desmarcado).
    Um checkbox desmarcado normalmente chega como None.
    """

    def __init__(self, value=None, options=None):
        super().__init__(value, options)
        self.value = self.is_checked()

    def is_checked(self) -> bool:
        return self.value is not None and bool(self.value)


class URLField(Field):
    """
    Valida texto como URL. O valor é escapado como em encodeURI antes de ser
    guardado. 'absolute' exige esquema opcional seguido de '//'.
    """
    _logger = Logger("URLField")
    options_class = URLOptions

    def __init__(self, value=None, options=None):
        super().__init__(quote(as_text(value), safe=URI_SAFE), options)
        self.absolute = self.options.absolute
        default = settings.ABSOLUTE_URL_EXPRESSION if self.absolute else settings.RELATIVE_URL_EXPRESSION
        self.validator = FormatValidator(self.options.expression, default)

    def validate(self) -> bool:
        return self._check(self.validator)


class ChoiceField(Field):
    """Valor precisa estar em 'choices'. Sem escolhas o campo nunca valida."""
    _logger = Logger("ChoiceField")
    options_class = ChoiceOptions

    def validate(self) -> bool:
        return self._check(InclusionValidator(self.options.choices))
