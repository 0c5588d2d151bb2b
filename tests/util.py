from oauthrevoke.oauth2.rfc6749 import OAuth2Request


class RecordingAuthenticator:
    """Authenticator that remembers every revocation request it gets and
    answers with ``result``, raising it when it is an exception.
    """

    def __init__(self, result=None):
        self.result = result
        self.requests = []

    def authenticate(self, revocation_request):
        self.requests.append(revocation_request)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def create_oauth2_request(form, principal=None, method="POST", path="/oauth2/revoke"):
    return OAuth2Request(method, path, form=form, principal=principal)
