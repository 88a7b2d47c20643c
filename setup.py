from setuptools import setup, find_packages
import os

# Set umask to get standard permissions (rwxr-xr-x for dirs, rw-r--r-- for files)
os.umask(0o022)

setup(
    name="pyjump",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "click>=8.0.0",  # For CLI interface
        "python-xlib>=0.33",  # For window types, WM_CLASS, minimize and pointer warp
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pyjump=pyjump.cli:main",
        ],
    },
    description="Focus an application's window, or launch the application if it is not running",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Environment :: X11 Applications",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
