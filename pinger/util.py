# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

import math
import time

PRECISION = 4


def now():
    return time.perf_counter()


def elapsed_ms(start):
    return round(max(0.0, now() - start) * 1000, PRECISION)


def whole_seconds(timeout):
    # ping flags only take integral seconds
    return max(1, int(math.ceil(float(timeout))))
