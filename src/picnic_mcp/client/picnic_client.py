"""Lifecycle management for the process-wide Picnic API client.

``PicnicClientManager`` owns at most one authenticated ``PicnicAPI`` instance.
``initialize`` logs in once and caches the client, ``get`` returns it, and
``reset`` forgets it. Concurrent ``initialize`` calls share a single login
attempt, so every caller sees the same client or the same exception.

The module-level ``initialize_picnic_client``, ``get_picnic_client`` and
``reset_picnic_client`` functions operate on a default manager shared by the
whole process.
"""

import asyncio
import logging
from collections.abc import Callable

from python_picnic_api2 import PicnicAPI

from ..config import SUPPORTED_COUNTRY_CODES, PicnicConfig, load_config

logger = logging.getLogger("picnic_mcp.client")

DEFAULT_API_VERSION = "15"
DEFAULT_LOGIN_TIMEOUT_S = 30.0
PICNIC_URL_TEMPLATE = "https://storefront-prod.{country}.picnicinternational.com/api/{version}"

ClientFactory = Callable[[str, str], PicnicAPI]


class ClientNotInitializedError(RuntimeError):
    """Raised when the Picnic client is used before it has been initialized."""


def create_picnic_client(country_code: str, api_version: str) -> PicnicAPI:
    """Construct an unauthenticated Picnic client for a country and API version.

    Args:
        country_code: Picnic market, ``"NL"`` or ``"DE"``.
        api_version: Storefront API version segment of the base URL.

    Returns:
        A ``PicnicAPI`` instance that still needs ``login``.

    """
    client = PicnicAPI(country_code=country_code)
    # PicnicAPI pins its own API version; point it at the requested one.
    client._base_url = PICNIC_URL_TEMPLATE.format(country=country_code.lower(), version=api_version)  # noqa: SLF001
    return client


class PicnicClientManager:
    """Hold a single authenticated Picnic client for the lifetime of the process."""

    def __init__(
        self,
        *,
        client_factory: ClientFactory = create_picnic_client,
        config_loader: Callable[[], PicnicConfig] = load_config,
        login_timeout_s: float | None = DEFAULT_LOGIN_TIMEOUT_S,
    ) -> None:
        """Initialize the manager.

        Args:
            client_factory: Builds an unauthenticated client from a country code and API version.
            config_loader: Returns the validated configuration used for missing arguments.
            login_timeout_s: Upper bound for the login call in seconds, or ``None`` for no limit.

        """
        self._client_factory = client_factory
        self._config_loader = config_loader
        self._login_timeout_s = login_timeout_s
        self._client: PicnicAPI | None = None
        self._pending: asyncio.Task[PicnicAPI] | None = None
        self._generation = 0

    @property
    def is_initialized(self) -> bool:
        """Return True when an authenticated client is cached."""
        return self._client is not None

    async def initialize(
        self,
        username: str | None = None,
        password: str | None = None,
        country_code: str | None = None,
        api_version: str = DEFAULT_API_VERSION,
    ) -> PicnicAPI:
        """Authenticate and cache the Picnic client unless one already exists.

        Explicit arguments take precedence over the configuration. When a
        client is already cached the arguments are ignored and the cached
        client is returned without logging in again.

        Args:
            username: Picnic account e-mail; defaults to ``PICNIC_USERNAME``.
            password: Picnic account password; defaults to ``PICNIC_PASSWORD``.
            country_code: ``"NL"`` or ``"DE"``; defaults to ``PICNIC_COUNTRY_CODE``.
            api_version: Storefront API version.

        Returns:
            The authenticated client.

        Raises:
            ValueError: If ``country_code`` is not a supported market.
            ConfigurationError: If a value must come from an invalid configuration.
            TimeoutError: If login exceeds the configured timeout.

        """
        if self._client is not None:
            return self._client

        if self._pending is None:
            if country_code and country_code not in SUPPORTED_COUNTRY_CODES:
                msg = f"Unsupported Picnic country code {country_code!r}; expected one of {SUPPORTED_COUNTRY_CODES}."
                raise ValueError(msg)
            if not (username and password and country_code):
                config = self._config_loader()
                username = username or config.username
                password = password or config.password
                country_code = country_code or config.country_code

            task = asyncio.ensure_future(
                self._login(
                    username=username,
                    password=password,
                    country_code=country_code,
                    api_version=api_version,
                    generation=self._generation,
                ),
            )
            task.add_done_callback(self._clear_pending)
            self._pending = task

        return await asyncio.shield(self._pending)

    def get(self) -> PicnicAPI:
        """Return the cached client.

        Raises:
            ClientNotInitializedError: If ``initialize`` has not completed successfully.

        """
        if self._client is None:
            msg = "Picnic client has not been initialized. Call initialize_picnic_client() first."
            raise ClientNotInitializedError(msg)
        return self._client

    def reset(self) -> None:
        """Discard the cached client without logging out."""
        self._client = None
        self._pending = None
        self._generation += 1

    def _clear_pending(self, task: asyncio.Task[PicnicAPI]) -> None:
        if self._pending is task:
            self._pending = None
        # Mark the exception as retrieved when every waiter has gone away.
        if not task.cancelled():
            task.exception()

    async def _login(
        self,
        *,
        username: str,
        password: str,
        country_code: str,
        api_version: str,
        generation: int,
    ) -> PicnicAPI:
        logger.info("Initializing Picnic client...")
        client = self._client_factory(country_code, api_version)
        try:
            await asyncio.wait_for(
                asyncio.to_thread(client.login, username, password),
                timeout=self._login_timeout_s,
            )
        except Exception:
            logger.exception("Failed to authenticate with Picnic")
            raise

        # PicnicAPI.login only raises for rejected credentials; other responses
        # (e.g. a second-factor challenge) return without an auth token.
        if not client.logged_in():
            msg = "Picnic login returned no auth token."
            logger.error(msg)
            raise RuntimeError(msg)

        if generation == self._generation:
            self._client = client
            logger.info("Picnic client initialized successfully.")
        else:
            logger.debug("Picnic client was reset during login; discarding the new session.")
        return client


_default_manager = PicnicClientManager()


def get_client_manager() -> PicnicClientManager:
    """Return the process-wide client manager."""
    return _default_manager


async def initialize_picnic_client(
    username: str | None = None,
    password: str | None = None,
    country_code: str | None = None,
    api_version: str = DEFAULT_API_VERSION,
) -> PicnicAPI:
    """Initialize the process-wide Picnic client (no-op if already initialized)."""
    return await _default_manager.initialize(username, password, country_code, api_version)


def get_picnic_client() -> PicnicAPI:
    """Return the process-wide Picnic client or raise ``ClientNotInitializedError``."""
    return _default_manager.get()


def reset_picnic_client() -> None:
    """Forget the process-wide Picnic client."""
    _default_manager.reset()


__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_LOGIN_TIMEOUT_S",
    "ClientFactory",
    "ClientNotInitializedError",
    "PicnicClientManager",
    "create_picnic_client",
    "get_client_manager",
    "get_picnic_client",
    "initialize_picnic_client",
    "reset_picnic_client",
]
