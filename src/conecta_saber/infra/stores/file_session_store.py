"""File Session Store: sessão persistida em JSON no disco do dispositivo.

Sobrevive a reinícios do app. A gravação é feita num arquivo temporário
no mesmo diretório e trocada com `os.replace`, então um leitor nunca vê
token sem usuário (ou vice-versa).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from conecta_saber.protocols.session_store import SessionStoreProtocol
from conecta_saber.sessions.models import Session
from conecta_saber.utils.errors import SessionStoreError

logger = logging.getLogger(__name__)

# Só o dono do arquivo lê o token
_FILE_MODE = 0o600


class FileSessionStore(SessionStoreProtocol):
    """Store de sessão em arquivo JSON.

    Args:
        path: Caminho do arquivo de sessão (diretórios criados sob demanda)
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, session: Session) -> None:
        data = json.dumps(session.to_dict())
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(data)
                os.chmod(tmp_name, _FILE_MODE)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("session_save_error", extra={"backend": "file", "error_type": type(e).__name__})
            raise SessionStoreError() from e
        logger.debug("session_saved", extra={"backend": "file"})

    def load(self) -> Session | None:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error("session_read_error", extra={"backend": "file", "error_type": type(e).__name__})
            raise SessionStoreError() from e
        try:
            return Session.from_dict(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            # Arquivo corrompido equivale a "sem sessão": o usuário refaz login
            logger.warning("session_load_error", extra={"backend": "file", "error_type": type(e).__name__})
            return None

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("session_clear_error", extra={"backend": "file", "error_type": type(e).__name__})
            raise SessionStoreError() from e
