import setuptools

setuptools.setup(
	name='puzzleparse',
	version='0.1.0',
	packages=[
		'puzzleparse',
		'puzzleparse.support',
	],
	description='Declarative extraction of structured values from puzzle inputs',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
	],
)
