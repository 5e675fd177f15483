import os

import setuptools

setuptools.setup(
    name="radiobus",
    version="0.1.0",
    author="Gustavo Ramos Rehermann",
    author_email="rehermann6046@gmail.com",
    license="MIT",
    description="In-process events, commands and requests over named channels.",
    long_description=open(os.path.join(os.path.dirname(__file__), "description.md")).read(),
    long_description_content_type="text/markdown",
    keywords="events commands requests channels messaging pubsub",
    install_requires=open(os.path.join(os.path.dirname(__file__), "requirements.txt"))
    .read()
    .strip()
    .split("\n"),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
    packages=["radiobus"],
    classifiers=[
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Application Frameworks",
        "Topic :: Communications",
    ],
)
