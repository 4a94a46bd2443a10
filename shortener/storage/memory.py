"""
In-memory link store.

The whole mapping lives in one dict guarded by one lock. Entries are lost
when the process exits.
"""
import threading
from typing import Callable

from shortener.config import settings
from shortener.logging_config import setup_logging
from shortener.storage.base import LinkStore
from shortener.storage.exceptions import (
    CodeAlreadyExistsError,
    CodeSpaceExhaustedError,
    InvalidInputError,
    LinkNotFoundError,
)
from shortener.utils.ids import generate_short_code
from shortener.utils.validators import (
    RESERVED_CODES,
    ValidationError,
    validate_long_url,
    validate_short_code,
)

logger = setup_logging()


class InMemoryLinkStore(LinkStore):
    """
    Thread-safe in-memory link store.

    FastAPI runs sync endpoints in a thread pool, so create() and resolve()
    can be called from many threads at once. The existence check and the
    insert for a code always happen under the same acquisition of _lock.
    """

    def __init__(
        self,
        code_length: int | None = None,
        max_attempts: int | None = None,
        max_custom_code_length: int | None = None,
        code_generator: Callable[[int], str] = generate_short_code,
    ):
        """
        Initialize the store.

        Args:
            code_length: Length of generated codes (default from config)
            max_attempts: Generation attempts before giving up (default from config)
            max_custom_code_length: Longest accepted requested code (default from config)
            code_generator: Function returning a random code of the given length
        """
        self.code_length = (
            code_length if code_length is not None else settings.SHORT_CODE_LENGTH
        )
        self.max_attempts = (
            max_attempts if max_attempts is not None else settings.SHORT_CODE_MAX_ATTEMPTS
        )
        self.max_custom_code_length = (
            max_custom_code_length
            if max_custom_code_length is not None
            else settings.MAX_CUSTOM_CODE_LENGTH
        )
        self._generate = code_generator
        self._links: dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, long_url: str, requested_code: str | None = None) -> str:
        try:
            validate_long_url(long_url)
            if requested_code is not None:
                validate_short_code(requested_code, self.max_custom_code_length)
        except ValidationError as e:
            raise InvalidInputError(e.errors) from e

        if requested_code is not None:
            return self._insert_requested(long_url, requested_code)
        return self._insert_generated(long_url)

    def resolve(self, short_code: str) -> str:
        with self._lock:
            long_url = self._links.get(short_code)

        if long_url is None:
            raise LinkNotFoundError(short_code)
        return long_url

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def __contains__(self, short_code: object) -> bool:
        with self._lock:
            return short_code in self._links

    def _insert_requested(self, long_url: str, code: str) -> str:
        with self._lock:
            if code in self._links:
                raise CodeAlreadyExistsError(code)
            self._links[code] = long_url

        logger.info(f"Created short link code={code} (requested)")
        return code

    def _insert_generated(self, long_url: str) -> str:
        for attempt in range(1, self.max_attempts + 1):
            candidate = self._generate(self.code_length)

            with self._lock:
                # 檢查與寫入必須在同一個lock區塊內，避免兩個請求同時寫入同一個code
                if candidate not in self._links and candidate not in RESERVED_CODES:
                    self._links[candidate] = long_url
                    break

            logger.warning(
                f"Generated short code collided, retrying "
                f"(attempt {attempt}/{self.max_attempts})"
            )
        else:
            logger.error(
                f"No free short code after {self.max_attempts} attempts"
            )
            raise CodeSpaceExhaustedError(self.max_attempts)

        logger.info(f"Created short link code={candidate}")
        return candidate
