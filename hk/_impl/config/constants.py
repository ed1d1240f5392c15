from hk._impl.util import HkEnvVar

API_ENDPOINT = HkEnvVar.API_URL.get() or "https://api.heroku.com"
API_ACCEPT = "application/vnd.heroku+json; version=3"
