from setuptools import setup, find_packages

setup(
    name='slidemedia',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'python-pptx', 'lxml', 'pandas', 'Pillow'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'slidemedia=slidemedia.cli:main'
        ]
    },
)
