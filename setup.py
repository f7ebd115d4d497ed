from setuptools import setup, find_packages

setup(
    name="ncaa_predictor",
    version="1.0.0",
    description="NCAA win prediction service: trains a small neural network on team statistics and explains its predictions",
    packages=find_packages(include=["ncaa_predictor", "ncaa_predictor.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
        "scikit-learn",
        "flask>=2.2",
        "flask-cors",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'ncaa-predict=ncaa_predictor.scripts.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
