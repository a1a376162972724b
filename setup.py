from setuptools import setup, find_packages


setup(
    name='roman-calc',
    version='1.0.0',
    description="Conversion, validation and arithmetic for roman numbers",
    license='CC0',
    packages=find_packages(exclude=['tests']),
    long_description="Converts integers from 1 to 3999 to roman numbers and back, "
                     "with strict validation of the numbers' grammar.",
    python_requires='>=3.6',
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['roman-calc=roman_calc.__main__:main'],
    },
    keywords='roman numerals numbers conversion',
    include_package_data=True,
    zip_safe=False,
)
