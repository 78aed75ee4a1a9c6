{'config-search-paths': ['{:user-config-path}/regref/config.yaml',],
 'auth-variables': {
     'log-level': {
         'default': 'INFO',
         'environment-variables': 'REGREF_LOG_LEVEL'},}}
