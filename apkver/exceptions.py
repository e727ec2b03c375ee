# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exception hierarchy for apkver.

This module defines the errors apkver can raise. There are two tiers:

- APKVerError and its subclasses: recoverable problems caused by the
  environment, such as a broken settings file (ConfigError).
- CursorOverrunError: an internal invariant violation in the tokenizer.
  It subclasses AssertionError, not APKVerError, so a handler written for
  recoverable errors never swallows it.

Malformed version strings are not errors at all. They tokenize to INVALID
tokens and still compare deterministically.

Example:
    Catching configuration errors:
        ```python
        from apkver.config import load_settings
        from apkver.exceptions import ConfigError

        try:
            settings = load_settings(Path(".apkver.yaml"))
        except ConfigError as e:
            print(f"Config error: {e}")
        ```

    Catching all apkver errors:
        ```python
        from apkver.exceptions import APKVerError

        try:
            settings = load_settings()
        except APKVerError as e:
            print(f"apkver error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "APKVerError",
    "ConfigError",
    "CursorOverrunError",
]


class APKVerError(Exception):
    """Base exception for all recoverable apkver errors.

    All apkver-specific recoverable exceptions inherit from this class,
    allowing users to catch them with a single except clause.
    """

    pass


class ConfigError(APKVerError):
    """Raised for settings-related errors.

    This exception is raised when there are problems with:

    - A settings file that does not exist
    - YAML parsing (syntax errors, empty documents, non-mapping documents)
    - An unsupported apiVersion
    - Settings values of the wrong type or out of range

    Example:
        Catching configuration errors:
            ```python
            from apkver.exceptions import ConfigError

            try:
                settings = load_settings(Path("broken.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class CursorOverrunError(AssertionError):
    """Raised when a version cursor reads or advances past its string.

    This is a tokenizer defect, never a property of the input data, and
    should not be caught and retried.
    """

    pass
