# scanner/messages.py

from abc import ABC, abstractmethod


class MessageProvider(ABC):
    """
    Localized error strings shown by the reader when an attempt is rejected.
    One method per violation kind; a new locale implements all of them.
    """
    locale: str = ""

    @abstractmethod
    def min_len_string(self, min_len: int) -> str:
        ...

    @abstractmethod
    def max_len_string(self, max_len: int) -> str:
        ...

    @abstractmethod
    def no_options(self) -> str:
        ...

    @abstractmethod
    def invalid_option(self) -> str:
        ...

    @abstractmethod
    def file_not_found(self) -> str:
        ...

    @abstractmethod
    def not_int(self) -> str:
        ...

    @abstractmethod
    def not_natural(self) -> str:
        ...

    @abstractmethod
    def int_not_in_range(self, min_value: int, max_value: int) -> str:
        ...

    @abstractmethod
    def not_float(self) -> str:
        ...

    @abstractmethod
    def float_not_in_range(self, min_value: float, max_value: float) -> str:
        ...


class EnglishMessages(MessageProvider):
    locale = "en"

    def min_len_string(self, min_len: int) -> str:
        return f"The string must have at least {min_len} characters."

    def max_len_string(self, max_len: int) -> str:
        return f"The string must have at most {max_len} characters."

    def no_options(self) -> str:
        return "There are no options to choose from."

    def invalid_option(self) -> str:
        return "The option is not valid."

    def file_not_found(self) -> str:
        return "The file does not exist."

    def not_int(self) -> str:
        return "The value is not a valid integer."

    def not_natural(self) -> str:
        return "The number must be a natural -> [0, inf)"

    def int_not_in_range(self, min_value: int, max_value: int) -> str:
        return f"The number must be an integer in the range [{min_value}, {max_value}]"

    def not_float(self) -> str:
        return "The value is not a valid float."

    def float_not_in_range(self, min_value: float, max_value: float) -> str:
        return f"The number must be a float in the range [{min_value:f}, {max_value:f}]"


class SpanishMessages(MessageProvider):
    locale = "es"

    def min_len_string(self, min_len: int) -> str:
        return f"La cadena debe tener al menos {min_len} caracteres."

    def max_len_string(self, max_len: int) -> str:
        # Same wording as the minimum; kept as shipped.
        return f"La cadena debe tener al menos {max_len} caracteres."

    def no_options(self) -> str:
        return "No hay opciones para elegir."

    def invalid_option(self) -> str:
        return "La opción no es válida."

    def file_not_found(self) -> str:
        return "El archivo no existe."

    def not_int(self) -> str:
        return "El valor no es un entero válido."

    def not_natural(self) -> str:
        return "El número debe ser natural -> [0, inf)"

    def int_not_in_range(self, min_value: int, max_value: int) -> str:
        return f"El número debe ser un entero en el rango [{min_value}, {max_value}]"

    def not_float(self) -> str:
        return "El valor no es un float válido."

    def float_not_in_range(self, min_value: float, max_value: float) -> str:
        return f"El número debe ser un float en el rango [{min_value:f}, {max_value:f}]"


# Locale registry
LOCALES: dict[str, type[MessageProvider]] = {
    "en": EnglishMessages,
    "es": SpanishMessages,
}

DEFAULT_LOCALE = "en"


def register_locale(code: str, provider_cls: type[MessageProvider]):
    if not code or not code.strip():
        raise ValueError("locale code must not be empty")
    if not (isinstance(provider_cls, type) and issubclass(provider_cls, MessageProvider)):
        raise TypeError(f"{provider_cls!r} is not a MessageProvider subclass")
    LOCALES[code.strip().lower()] = provider_cls


def available_locales() -> list[str]:
    return sorted(LOCALES)


def get_messages(locale: str = DEFAULT_LOCALE) -> MessageProvider:
    """
    Returns a fresh provider for `locale`. Raises KeyError for unknown codes.
    """
    key = (locale or DEFAULT_LOCALE).strip().lower()
    try:
        return LOCALES[key]()
    except KeyError:
        raise KeyError(f"Unknown locale '{locale}'. Available: {', '.join(available_locales())}") from None
