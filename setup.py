import setuptools

setuptools.setup(
	name='peeklex',
	version='0.1.0',
	packages=[
		'peeklex',
		'peeklex.dialect',
		'peeklex.scanning',
		'peeklex.support',
	],
	description='Ordered-choice lexical scanner with arbitrary-depth lookahead',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
