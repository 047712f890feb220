from typing import Any, Callable, Dict, List, Optional

from webforms import settings
from webforms.abstract.abstract_field import AbstractField
from webforms.exceptions import ConfigurationError
from webforms.utils.logger import Logger

VALIDATION_ERROR = settings.VALIDATION_ERROR

SaveCallback = Callable[[Optional[Any]], None]


class Form:
    """
    Formulário base. Cada formulário concreto deve preencher ``fields`` com
    pares nome -> Field e sobrescrever ``persist`` para gravar os dados.

    data: os dados do formulário, normalmente o corpo de um POST.
    options: opções desta instância, repassadas sem validação para a lógica
        de gravação das subclasses.
    """
    _logger = Logger("Form")

    def __init__(self, data: Optional[Dict[str, Any]] = None, options: Optional[Dict[str, Any]] = None):
        self.data = data or {}
        self.fields: Dict[str, AbstractField] = {}
        self.options = options or {}

    def add_field(self, name: str, field: AbstractField) -> AbstractField:
        if name in self.fields:
            raise ConfigurationError(f"Campo '{name}' já existe em {self.__class__.__name__}")
        self.fields[name] = field
        return field

    def validate(self) -> bool:
        for name, field in self.fields.items():
            if not field.validate():
                self._logger.debug(f"{self.__class__.__name__}: campo '{name}' inválido")
                return False
        return True

    def invalid_fields(self) -> List[str]:
        return [name for name, field in self.fields.items() if not field.validate()]

    def values(self) -> Dict[str, Any]:
        return {name: field.value for name, field in self.fields.items()}

    def save(self, callback: SaveCallback, validate: bool = True):
        """
        Valida (a menos que validate=False) e grava o formulário.

        callback é chamado exatamente uma vez. Erros vão no primeiro
        argumento; em caso de sucesso ele recebe None.
        """
        if validate and not self.validate():
            self._logger.warning(f"{self.__class__.__name__} não passou na validação")
            callback(VALIDATION_ERROR)
            return

        self._logger.debug(f"Gravando {self.__class__.__name__}")
        self.persist(self._report(callback))

    def _report(self, callback: SaveCallback) -> SaveCallback:
        def done(error=None):
            if error is None:
                self._logger.info(f"{self.__class__.__name__} gravado com sucesso")
            else:
                self._logger.error(f"Falha ao gravar {self.__class__.__name__}: {error}")
            callback(error)
        return done

    def save_without_validation(self, callback: SaveCallback):
        self.save(callback, validate=False)

    def persist(self, callback: SaveCallback):
        # Formulários concretos gravam aqui e chamam callback ao terminar.
        callback(None)
