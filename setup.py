import re
from setuptools import setup


def find_version(filename):
    _version_re = re.compile(r"__version__ = ['\"](.*)['\"]")
    last = None  # match python semantics
    for line in open(filename):
        version_match = _version_re.match(line)
        if version_match:
            last = version_match.group(1)

    return last


__version__ = find_version('regref/__init__.py')

with open('README.md', 'rt') as f:
    long_description = f.read()

tests_require = ['pytest']
setup(name='regref',
      version=__version__,
      description='Parse, validate, and normalize content registry references.',
      long_description=long_description,
      long_description_content_type='text/markdown',
      author='regref contributors',
      license='MIT',
      classifiers=[
          'Development Status :: 4 - Beta',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy',
          'Operating System :: POSIX :: Linux',
          'Operating System :: MacOS :: MacOS X',
          'Operating System :: Microsoft :: Windows',
      ],
      keywords=('python container image reference registry digest'),
      packages=[
          'regref',
      ],
      package_data={'regref': ['auth-config.py']},
      python_requires='>=3.8',
      tests_require=tests_require,
      install_requires=['orthauth[yaml,sxpr]>=0.0.13'],
      extras_require={'test': tests_require,
                     },
      scripts=[],
      entry_points={'console_scripts': [ ],},
     )
