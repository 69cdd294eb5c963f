# Envelope status values
STATUS_SUCCESS = "success"
STATUS_FAIL = "fail"


# Validation reasons raised by the store
REASON_MISSING_NAME = "missing name"
REASON_READ_PAGE = "readPage exceeds pageCount"


# Length of generated book ids
BOOK_ID_LENGTH = 16


# Response messages
ADD_SUCCESS = "Buku berhasil ditambahkan"
ADD_FAILED = "Buku gagal ditambahkan"
ADD_INVALID = {
    REASON_MISSING_NAME: "Gagal menambahkan buku. Mohon isi nama buku",
    REASON_READ_PAGE: "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount",
}

NOT_FOUND = "Buku tidak ditemukan"

UPDATE_SUCCESS = "Buku berhasil diperbarui"
UPDATE_NOT_FOUND = "Gagal memperbarui buku. Id tidak ditemukan"
UPDATE_INVALID = {
    REASON_MISSING_NAME: "Gagal memperbarui buku. Mohon isi nama buku",
    REASON_READ_PAGE: "Gagal memperbarui buku. readPage tidak boleh lebih besar dari pageCount",
}

DELETE_SUCCESS = "Buku berhasil dihapus"
DELETE_NOT_FOUND = "Buku gagal dihapus. Id tidak ditemukan"

BAD_REQUEST_BODY = "Gagal memproses permintaan. Body tidak valid"
ROUTE_NOT_FOUND = "Halaman tidak ditemukan"
METHOD_NOT_ALLOWED = "Metode tidak diizinkan"
SERVER_ERROR = "Terjadi kegagalan pada server kami"
