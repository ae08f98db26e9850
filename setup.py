from setuptools import setup


def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='rationals',
    version='0.1.0',
    description='Exact rational numbers kept in lowest terms',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Topic :: Education',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    keywords='rational fraction arithmetic gcd',
    license='MIT',
    packages=['rationals'],
    scripts=[
        'bin/rational-calc',
    ],
    install_requires=[
        'plac',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    include_package_data=True,
    zip_safe=False,
)
