# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Chat backend: registration, login and messages over HTTP."""
