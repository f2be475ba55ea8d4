"""Base model for authority payloads."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)


class AuthorityBaseModel(BaseModel):
    """Accepts unknown keys and logs each new one once per model class."""

    model_config = ConfigDict(extra="allow", frozen=True)
    source_label: ClassVar[str] = "authority"
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "%s %s: unmodeled keys: %s",
            self.source_label,
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )
