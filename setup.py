import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="todolists",
    version="0.1.0",
    description="Todo lists kept in the Django session",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    include_package_data=True,
    package_data={
        "todolists": [
            "templates/todolists/*.html",
            "static/todolists/*",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: Django",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "django>=4.2",
        "asgiref>=3.7",
        "whitenoise>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-django",
            "beautifulsoup4",
        ],
    },
)
