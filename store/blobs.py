import os
from werkzeug.utils import secure_filename


def allowed_attachment(filename, allowed_ext):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed_ext


class LocalBlobStore:
    """Keeps uploaded invoices and receipts under a local folder.

    ``store`` returns the URL the file is served back from.
    """

    def __init__(self, root, url_prefix='/uploads'):
        self.root = root
        self.url_prefix = url_prefix.rstrip('/')

    def store(self, path, data):
        parts = [secure_filename(p) for p in path.split('/') if p]
        if not parts or not all(parts):
            raise ValueError(f"Invalid blob path: {path!r}")
        target = os.path.join(self.root, *parts)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, 'wb') as f:
            f.write(data)
        return f"{self.url_prefix}/{'/'.join(parts)}"


def attachment_path(kind, user_id, record_id, filename):
    return f"{kind}/{user_id}/{record_id}/{secure_filename(filename)}"
