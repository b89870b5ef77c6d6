"""
setup.py

Сборка и установка.

Использование:
    pip install -e .            # установка для разработки
    pip install -e .[test]      # с pytest
    hanoi --disks 4             # запуск после установки
"""

from setuptools import setup

setup(
    name="hanoi_tower",
    version="1.0.0",
    description="Interactive Tower of Hanoi in the terminal",
    python_requires=">=3.8",
    packages=["core", "peg_io", "solutions", "utils"],
    py_modules=["main", "session"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hanoi=main:main",
        ],
    },
    zip_safe=False,
)
