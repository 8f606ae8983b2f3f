# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import sys

from .cli import main

sys.exit(main())
