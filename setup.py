# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='digestif',
  version='0.1.0',
  description='Compute message digests with many algorithms in a single pass, and verify checksums of unknown format.',
  python_requires='>=3.10',

  packages=['digestif', 'digestif.bin', 'utest'],
  install_requires=[
    'blake3',
    'cryptography',
    'pycryptodome',
  ],
  entry_points={
    'console_scripts': [
      'digestif=digestif.bin.digestif:main',
    ],
  },
)
