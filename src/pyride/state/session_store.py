"""Authenticated session store."""

from __future__ import annotations

import logging

from pyride.models.session import Identity, Profile, Role, Session
from pyride.state.observable import Notifier, ObservableStore

_logger = logging.getLogger(__name__)


class SessionStore(ObservableStore[Session]):
    """Current identity, role, profile and loading flag.

    Starts empty with ``loading=True``. Each setter replaces exactly one
    field; none of them checks cross-field consistency. :meth:`logout`
    clears identity, role and profile together and leaves ``loading`` as is.
    """

    def __init__(self, *, notifier: Notifier[Session] | None = None) -> None:
        super().__init__(Session(), notifier=notifier)

    @property
    def session(self) -> Session:
        return self.snapshot

    def set_identity(self, identity: Identity | None) -> None:
        self._commit(lambda s: s.model_copy(update={"identity": identity}))

    def set_role(self, role: Role | None) -> None:
        self._commit(lambda s: s.model_copy(update={"role": role}))

    def set_profile(self, profile: Profile | None) -> None:
        self._commit(lambda s: s.model_copy(update={"profile": profile}))

    def set_loading(self, loading: bool) -> None:
        self._commit(lambda s: s.model_copy(update={"loading": loading}))

    def logout(self) -> None:
        _logger.debug("Clearing session")
        self._commit(lambda s: Session(loading=s.loading))
