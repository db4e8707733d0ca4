import os
import logging

class Config:
    # Listen address, same for every profile
    HOST = '0.0.0.0'
    PORT = 3000

    DEBUG = False
    TESTING = False
    LOG_LEVEL = logging.INFO

class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = logging.DEBUG

class ProductionConfig(Config):
    pass

class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = logging.WARNING

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}

def get_config(name=None):
    """
    Profile for `name`, or for FLASK_ENV when no name is given.

    FLASK_ENV is read here only; Flask itself ignores it since 2.3.
    """
    if name is None:
        name = os.environ.get('FLASK_ENV', 'default')
    return config.get(name, config['default'])
