# Backend routes, relative to the base URL handed to the VFS client.

VFS = {
    "read_directory": {
        "method": "GET",
        "path": "/read-directory",
    },
    "read_file": {
        "method": "GET",
        "path": "/read-file",
    },
    "write_file": {
        "method": "POST",
        "path": "/write-file",
    },
    "delete_file": {
        "method": "DELETE",
        "path": "/delete-file",
    },
    "copy": {
        "method": "POST",
        "path": "/copy",
    },
    "move": {
        "method": "POST",
        "path": "/move",
    },
    "create_directory": {
        "method": "POST",
        "path": "/create-directory",
    },
    "file_info": {
        "method": "GET",
        "path": "/file-info",
    },
    "search": {
        "method": "POST",
        "path": "/search",
    },
    "upload": {
        "method": "POST",
        "path": "/upload",
    },
    "download_url": {
        "method": "GET",
        "path": "/download-url",
    },
}
