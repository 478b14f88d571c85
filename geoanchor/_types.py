from typing import Sequence, Union

import numpy as np


NUMBER_TYPE = Union[float, np.floating]
MATRIX_TYPE = Union[Sequence[float], np.ndarray]
