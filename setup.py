from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.md')).read()

version = '0.0.1'

install_requires = [
    'cached-property',  # lazily derived per-call values
]

test_requires = [
    # the tests are unittest.TestCase modules beside the code
    'pytest',
]

setup(
    name='modexp-precompile',
    version=version,
    description="EVM MODEXP precompile: modular exponentiation over "
                "big-endian byte strings",
    long_description=README + '\n\n',
    long_description_content_type='text/markdown',
    classifiers=[
        "Topic :: Software Development",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    keywords='modexp bigint evm precompile',
    license='LGPLv3+',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=install_requires,
    tests_require=test_requires,
    extras_require={
        'test': test_requires,
    },
    entry_points={
        'console_scripts': [
            'modexp=modexp.__main__:main',
        ]
    }
)
