import os
import sys
sys.path.insert(0, os.path.abspath('..'))
# Sphinx configuration for the pdfsigner API pages (index.rst).

import pdfsigner

project = 'pdfsigner'
release = pdfsigner.__version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

exclude_patterns = ['_build']
