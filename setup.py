import os
from setuptools import setup

def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname), "r") as f:
        return f.read()

def get_version():
    g = {}
    exec(read(os.path.join("proplogic", "version.py")), g)
    return g["Version"]


setup(
    name = "proplogic",
    version = get_version(),
    description = ("Propositional formula compiler: parser, algebraic optimizer and satisfying assignment deriver"),
    license = "BSD 3-clause",
    keywords = "boolean, propositional logic, parser, optimization, satisfiability",
    packages=['proplogic', 'proplogic.common', 'proplogic.formula', 'proplogic.satisfiability',
        'proplogic.logs', 'proplogic.ui', 'proplogic.ui.cli'],
    python_requires=">=3.7",
    install_requires=["pythreader >= 2.6", "pyyaml"],
    extras_require={
        "test": ["pytest", "hypothesis"]
    },
    zip_safe = False,
    classifiers=[
    ],
    entry_points = {
            "console_scripts": [
                "proplogic = proplogic.ui.proplogic_ui:main",
            ]
        }
)
