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

"""Settings loading for apkver.

Settings are read from an optional `.apkver.yaml` file (explicit path, or
found by walking upward from the working directory) and deep-merged over
built-in defaults.

Public API:

- load_settings: Load and validate effective settings
- Settings: Frozen dataclass holding the effective values

Example:
    Basic usage:

        from pathlib import Path
        from apkver.config import load_settings

        settings = load_settings(Path(".apkver.yaml"))
        print(settings.max_digits)  # 18

"""

from .loader import Settings, load_settings

__all__ = ["Settings", "load_settings"]
