from setuptools import find_packages, setup

setup(
  name="edsign",
  author="Edsign developers",
  description="EdDSA signatures on the twisted Edwards curve of BN254",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  use_scm_version={"fallback_version": "0.1.0"},
  setup_requires=["setuptools_scm"],
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "cryptography>=35",
    "pynacl>=1.4",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(console_scripts=["edsign = edsign.__main__:main"]),
)
