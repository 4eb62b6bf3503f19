from decouple import config

module_name = __package__.upper()

API_KEY = config(f'{module_name}_API_KEY', default='')
API_URL = config(f'{module_name}_API_URL', default='https://api.stripe.com/v1')
API_VERSION = config(f'{module_name}_API_VERSION', default='2018-02-28')
REQUEST_TIMEOUT = config(f'{module_name}_REQUEST_TIMEOUT', cast=int, default=80)
USER_AGENT = config(f'{module_name}_USER_AGENT', default='stripe-resources/0.1.0')
