"""
Setup script для модуля subtitle_frequency
"""

from setuptools import setup, find_packages
from pathlib import Path

# Читаем README для описания
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="subtitle_frequency",
    version="0.1.0",
    author="Sergey",
    description="Частотный список слов по японским субтитрам с морфологическим разбором",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Natural Language :: Japanese",
        "Topic :: Education :: Language",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.5.0",
        "openpyxl>=3.0.0",
        "beautifulsoup4>=4.11.0",
        "PyYAML>=6.0",
        "python-dotenv>=0.19.0",
        "rhoknp>=1.3.0",
        "sudachipy>=0.6.0",
        "sudachidict_core>=20230110",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "flake8>=4.0",
        ],
    },
    # Juman++ (бинарник jumanpp) ставится отдельно: https://github.com/ku-nlp/jumanpp
    entry_points={
        "console_scripts": [
            "subtitle-frequency=subtitle_frequency.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
