# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from pyzeros import __version__

# -- Project information -----------------------------------------------

project = 'PyZeros'
copyright = '2024, Eric J. Whitney'  # noqa
author = 'Eric J. Whitney'
version = __version__  # Short X.Y version.
release = version

# -- General configuration ---------------------------------------------

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.doctest',
              'sphinx.ext.intersphinx',
              'sphinx.ext.mathjax',
              'sphinx.ext.napoleon']
templates_path = ['_templates']
exclude_patterns = []

autosummary_generate = True
autodoc_default_options = {
    'members': True,
    'inherited-members': False,
    'exclude-members': '__abstractmethods__, __dict__, __hash__, '
                       '__module__, __slots__, __weakref__'}

# Solver references link to NumPy / SciPy where possible.
intersphinx_mapping = {
    'numpy': ('https://numpy.org/doc/stable/', None),
    'python': ('https://docs.python.org/3', None),
    'scipy': ('https://docs.scipy.org/doc/scipy/', None)}

napoleon_numpy_docstring = True
napoleon_google_docstring = False

# -- Options for HTML output -------------------------------------------

html_theme = 'pydata_sphinx_theme'
html_static_path = ['_static']
