from setuptools import setup, find_packages

setup(name='flashcards',
      version='0.1.0',
      description='term/definition flashcards in the terminal',
      author='gront',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      install_requires=[
          'pandas',
      ],
      extras_require={
          'spreadsheets': ['openpyxl', 'odfpy'],
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'flashcards=flashcards.session:main',
          ],
      },
     )
