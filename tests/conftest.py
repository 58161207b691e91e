import os
import sys
import logging

import pytest
import numpy as np


TESTS_DIR = os.path.abspath(os.path.dirname(__file__))


@pytest.fixture(scope="function", autouse=True)
def random_seed():
    random_seed = 12345
    np.random.seed(random_seed)
    return random_seed


@pytest.fixture(scope="function", autouse=True)
def logger():
    logger = logging.getLogger("matrixprobs")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        formatter = logging.Formatter("%(asctime)s:%(message)s")
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


@pytest.fixture(scope="session")
def reads_file():
    # Four variables and five reads. D is never observed and r5 has
    # no variable set.
    return os.path.join(TESTS_DIR, "reads.tsv")


@pytest.fixture(scope="session")
def ab_lines():
    return ["read\tA\tB\n",
            "r1\t1\t0\n",
            "r2\t1\t1\n",
            "r3\t0\t1\n"]


@pytest.fixture(scope="function")
def random_sample():
    # 200 reads of 6 variables with different frequencies.
    freqs = np.array([0.9, 0.5, 0.5, 0.2, 0.05, 0.0])
    return (np.random.random_sample((200, len(freqs))) < freqs).astype(int)
