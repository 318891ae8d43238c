from __future__ import annotations

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="chat-backend-tests-")

# Must be set before chat_backend modules read their configuration.
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["APP_ENV"] = "test"
os.environ.pop("LOG_FILE", None)
