from setuptools import setup, find_packages

setup(
    name="css-stylecheck",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'tinycss2>=1.3',
        'beautifulsoup4',
        'chardet',
        'colorama',
        'orjson',
        'requests',
        'validators',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'css-stylecheck=css_stylecheck.cli:main',
        ],
    },
    python_requires='>=3.8',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="A checker that reports every deviation of a stylesheet from a fixed CSS house style",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    url="https://github.com/fourfigs/css-stylecheck",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
