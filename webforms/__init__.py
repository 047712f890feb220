from webforms.fields import (
    Field, EmailField, PasswordField, UserField, SetPasswordFields,
    CheckboxField, URLField, ChoiceField
)
from webforms.forms import Form, VALIDATION_ERROR
from webforms.options import (
    FieldOptions, EmailOptions, PasswordOptions, UserOptions, URLOptions, ChoiceOptions
)
from webforms.exceptions import FormError, ConfigurationError, EncryptionError
