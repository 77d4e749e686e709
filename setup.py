from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='KeyTrie',
    version='0.1.0',
    description='prefix, suffix and sorted-array tries for keyword indexing',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    platforms='any',
    license='GPLv3+',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    install_requires=[
        'sortedcontainers',
        'chardet',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.11'
)
