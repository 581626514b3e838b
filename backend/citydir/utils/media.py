import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from citydir.errors import NotFoundError, ValidationError

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'mp4', 'mov', 'avi', 'webm', 'pdf'}

UPLOADS_URL_PREFIX = "/uploads"


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def upload_folder():
    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    return folder


def describe_file(filename):
    url = f"{UPLOADS_URL_PREFIX}/{filename}"
    return {"filename": filename, "name": filename, "path": url, "url": url}


def save_file(file):
    """
    Store an uploaded file under UPLOAD_FOLDER.

    Only the resulting URL path is ever written to the database.
    """
    if not file or not file.filename:
        raise ValidationError("No file uploaded")

    if not allowed_file(file.filename):
        raise ValidationError("File type not allowed")

    filename = secure_filename(file.filename)
    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    file.save(os.path.join(upload_folder(), unique_filename))
    current_app.logger.info("upload.save filename=%s", unique_filename)

    return describe_file(unique_filename)


def list_files():
    folder = upload_folder()
    names = sorted(
        name for name in os.listdir(folder)
        if os.path.isfile(os.path.join(folder, name)) and not name.startswith('.')
    )
    return [describe_file(name) for name in names]


def delete_file(filename):
    """
    Delete an uploaded file by name.
    """
    safe_name = secure_filename(filename)
    file_path = os.path.join(upload_folder(), safe_name)

    if not safe_name or not os.path.isfile(file_path):
        raise NotFoundError("File not found")

    try:
        os.remove(file_path)
    except OSError:
        current_app.logger.error("Failed to delete file %s", file_path, exc_info=True)
        raise

    current_app.logger.info("upload.delete filename=%s", safe_name)
