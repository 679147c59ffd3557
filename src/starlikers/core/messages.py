"""User-facing error messages keyed by HTTP status."""

DEFAULT_LOCALE = "en"

USER_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "unauthorized": "Invalid API credentials. Check your Application ID and Secret.",
        "forbidden": "Access denied. Check your API permissions.",
        "rate_limited": "Request limit exceeded. Try again in a few minutes.",
        "unprocessable": "Invalid data sent to the API. Check the parameters.",
        "server_error": "The API server is having problems. Try again later.",
        "network": "Connection error. Check your internet connection and try again.",
        "invalid_response": "The API returned an unexpected response. Try again later.",
        "unknown": "Unknown API error.",
    },
    "pt-BR": {
        "unauthorized": "Credenciais da API inválidas. Verifique sua Application ID e Secret.",
        "forbidden": "Acesso negado. Verifique suas permissões da API.",
        "rate_limited": "Limite de requisições excedido. Tente novamente em alguns minutos.",
        "unprocessable": "Dados inválidos enviados para a API. Verifique os parâmetros.",
        "server_error": "Erro no servidor da API. Tente novamente mais tarde.",
        "network": "Erro de conexão. Verifique sua internet e tente novamente.",
        "invalid_response": "Resposta inválida da API. Tente novamente mais tarde.",
        "unknown": "Erro desconhecido na API.",
    },
}

SUPPORTED_LOCALES = tuple(USER_MESSAGES)


def message_key(status: int | str) -> str | None:
    """Map a status code to a message key.

    Returns None for statuses without a dedicated message.
    """
    if isinstance(status, str):
        return status
    if status == 0:
        return "network"
    if status == 401:
        return "unauthorized"
    if status == 403:
        return "forbidden"
    if status == 422:
        return "unprocessable"
    if status == 429:
        return "rate_limited"
    if status >= 500:
        return "server_error"
    return None


def user_message_for(
    status: int | str,
    locale: str = DEFAULT_LOCALE,
    fallback: str | None = None,
) -> str:
    """Get the localized user message for a status code or message key.

    Args:
        status: HTTP status code (0 for network failure) or a message key
        locale: Locale name; unknown locales fall back to English
        fallback: Text used when the status has no dedicated message

    Returns:
        Message text
    """
    messages = USER_MESSAGES.get(locale, USER_MESSAGES[DEFAULT_LOCALE])
    key = message_key(status)
    if key is not None and key in messages:
        return messages[key]
    return fallback or messages["unknown"]
