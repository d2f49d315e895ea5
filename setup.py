"""
Setup script for PeerShare - Authenticated encryption for peer-to-peer sharing.

Created by orpheus497

This library provides:
- 256-bit random keys, transported as base64
- AES-256-GCM encryption of text messages and files
- A single base64 envelope (nonce || ciphertext || tag)
- Short random invite codes
- Optional QR code rendering for sharing codes and envelopes
"""

from setuptools import setup, find_packages
import os

this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='peershare-crypto',
    version='1.0.0',
    author='orpheus497',
    description='Authenticated encryption, envelopes and invite codes for peer-to-peer sharing',
    long_description=long_description,
    long_description_content_type='text/markdown',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Security :: Cryptography',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: OS Independent',
        'Environment :: Console',
    ],
    python_requires='>=3.8',
    install_requires=[
        'cryptography>=42.0.4',
        'argon2-cffi>=23.1.0',
        'rich>=13.7.0',
        'tomli>=2.0.1; python_version < "3.11"',
    ],
    extras_require={
        'qr': [
            'qrcode>=7.4',
            'pillow>=10.0.0',
        ],
        'test': [
            'pytest>=7.4.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'peershare=peershare.main:main',
        ],
    },
)
