# setup.py
from setuptools import setup, find_packages
from Cython.Build import cythonize
import os

# Full path to the evaluation loop; compiled to an extension on request
py_path = os.path.join("bprog", "evaluation", "evaluator.py")

ext_modules = []
if os.environ.get("BPROG_CYTHON") == "1":
    ext_modules = cythonize(
        py_path,
        compiler_directives={'language_level': "3", "boundscheck": False, "wraparound": False},
    )

setup(
    name="bprog",
    version="0.1.0",
    description="Interpreter for a small concatenative language",
    packages=find_packages(include=["bprog", "bprog.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    ext_modules=ext_modules,
    entry_points={"console_scripts": ["bprog = bprog.__main__:main"]},
    zip_safe=False,
)
