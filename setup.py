"""Setup script for the bibshelf package."""
from setuptools import setup, find_packages

setup(
    name="bibshelf",
    version="1.0.0",
    packages=find_packages(include=["bibshelf", "bibshelf.*"]),
    package_data={"bibshelf": ["templates/*.html"]},
    install_requires=[
        "requests>=2.25.0",
        "python-docx>=0.8.11",
        "flask>=2.0.0",
        "flask-limiter>=3.0.0",
        "jinja2>=3.0.0",
        "markupsafe>=2.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": ["bibshelf=bibshelf.__main__:main"],
    },
    python_requires=">=3.8",
    description="Parse BibTeX and CSV bibliographies and render them as HTML publication lists",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="bibtex bibliography publications latex html",
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Text Processing :: Markup",
    ],
)
