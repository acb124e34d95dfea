from setuptools import find_packages, setup

with open("README.md", "r") as fh:
	long_description = fh.read()

tests_require = ['coverage>=5.1', 'freezegun>=0.3.15', 'mock>=4.0.2', 'nose2>=0.9.2', 'pytest>=6.0']

setup(
	name='pykucoin',
	packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
	version='0.1.0',
	description="Python wrapper around the KuCoin v1 REST API",
	long_description=long_description,
	long_description_content_type="text/markdown",
	license='MIT',
	python_requires='>=3.6',
	install_requires=['python-dotenv>=0.15.0', 'requests>=2.23.0'],
	tests_require=tests_require,
	extras_require={'test': tests_require},
)
