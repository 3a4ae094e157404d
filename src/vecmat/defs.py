# Copyright 2024 Gergely Bencsik
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#     http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import numpy as np

DEG2RAD = np.pi / 180
RAD2DEG = 180 / np.pi
PI = np.pi

# Tolerances of approx(): relative term is scaled by the larger magnitude,
# absolute term is the floor.
REL_EPS = 1e-9
ABS_EPS = 1e-5

# Vectors have at least this many coordinates.
MIN_DIMENSION = 2

# Value of the appended coordinate when lifting a point to homogeneous form.
HOMOGENEOUS_W = 1.0

# Coordinate indices
X_AXIS = 0
Y_AXIS = 1
Z_AXIS = 2
