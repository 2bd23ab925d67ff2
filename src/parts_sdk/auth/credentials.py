"""Credential resolution for the parts API.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment without overriding it)
4. Default value

Example:
    ```python
    from parts_sdk.auth import CredentialResolver

    resolver = CredentialResolver()

    # PARTS_API_KEY, or the file named by PARTS_API_KEY_FILE
    api_key = resolver.resolve_api_key()

    # Any other setting
    base_url = resolver.resolve(env_var_name="PARTS_API_BASE_URL", default="http://localhost:8080/api/v1")
    ```

Security Considerations:
    - Credential values are never logged (masked with ***)
    - Only the source is logged (env var name, file path, etc.)
    - File-based credentials have whitespace stripped
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from parts_sdk.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "PARTS_API_KEY"
API_KEY_FILE_ENV_VAR = "PARTS_API_KEY_FILE"


class CredentialResolver:
    """Resolve settings and secrets from explicit values, the environment and .env.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading (useful in tests).
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Attempted once either way
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting; the first source that has it wins.

        Args:
            value: Explicit value, overrides every other source.
            env_var_name: Environment variable to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.
            mask_in_logs: Log ``***`` instead of the value (default True).

        Raises:
            CredentialNotFoundError: ``required`` is True and nothing matched.
        """
        result = None
        source = None

        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        elif default is not None:
            result, source = default, "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path comes from ``file_path`` or, failing that, from the
        environment variable ``env_var_name``. ``~`` and ``$VAR`` are
        expanded; the contents are stripped of surrounding whitespace.

        Raises:
            CredentialFileError: ``required`` is True and the file cannot be read.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if not path_to_use:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_api_key(self, value: str | None = None, *, required: bool = False) -> str | None:
        """Resolve the parts API key.

        Checks ``value``, then ``PARTS_API_KEY``, then the file named by
        ``PARTS_API_KEY_FILE``.
        """
        api_key = self.resolve(value=value, env_var_name=API_KEY_ENV_VAR)
        if api_key:
            return api_key

        api_key = self.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR)
        if api_key:
            return api_key

        if required:
            raise CredentialNotFoundError(
                f"Parts API key not found (checked {API_KEY_ENV_VAR} and {API_KEY_FILE_ENV_VAR})",
                env_var_name=API_KEY_ENV_VAR,
            )
        return None
