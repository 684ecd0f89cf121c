'''
    path
    ====

    High-level path utilities relative to project.
'''

import os


def project_dir():
    '''Get the directory to the project folder.'''

    path = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if 'site-packages' in path:
        return os.path.join(os.path.expanduser('~'), '.tweetboard')
    return path

def config_dir():
    '''Get the directory to the config folder.'''
    return os.path.join(project_dir(), 'config')

def log_dir():
    '''Get the directory to the log folder.'''
    return os.path.join(project_dir(), 'log')
