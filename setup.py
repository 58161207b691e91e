from setuptools import setup

import matrixprobs


setup(name="matrixprobs",
      version=matrixprobs.__version__,
      description="Marginal, joint and conditional probabilities "
                  "of indicator variables.",
      classifiers=[
          "Programming Language :: Python :: 3",
          "Operating System :: OS Independent",
          "Development Status :: 4 - Beta",
          "License :: OSI Approved :: Apache Software License",
          "Intended Audience :: Science/Research",
          "Topic :: Scientific/Engineering :: Bio-Informatics",
      ],
      packages=[
          "matrixprobs",
      ],
      install_requires=[
          "numpy >= 1.9.1",
      ],
      extras_require={
          "test": [
              "pytest",
              "coverage",
          ],
      },
      entry_points={
          "console_scripts": [
              "matrixprobs = matrixprobs.cli:main",
          ],
      })
