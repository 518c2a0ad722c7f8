"""
Setup script for the Grade Me package.
"""

from setuptools import find_packages, setup

setup(
    name="grade-me",
    version='1.0.0',
    description="Lists the submissions waiting for a grade in every course an instructor teaches.",
    install_requires=[
        "setuptools",
        "Django",
        "celery",
        "edx-celeryutils",
        "edx-django-utils",
        "edx-toggles",
        "markupsafe",
    ],
    extras_require={
        "test": [
            "ddt",
            "factory-boy",
            "lxml",
            "pytest",
            "pytest-django",
        ],
    },
    packages=find_packages(include=["grade_me", "grade_me.*"]),
    package_data={
        'grade_me': ['tests/fixtures/*.xml'],
    },
    entry_points={
        "lms.djangoapp": [
            "grade_me = grade_me.apps:GradeMeConfig",
        ],
    },
)
