import sys
import os.path

import gasplan

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
]
project = 'gasplan'
source_suffix = '.rst'
master_doc = 'index'

version = release = gasplan.__version__
copyright = 'GasPlan Team'

epub_basename = 'gasplan - {}'.format(version)
epub_author = 'GasPlan Team'

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
