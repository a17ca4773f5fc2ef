import sys
import hashlib

# CONFIGURATION
HASH_ALGO = "sha256"
READ_CHUNK = 4096

USAGE = "Usage: bin2img-check <file_a> <file_b>"


def file_hash(path, algo=HASH_ALGO):
    h = hashlib.new(algo)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(READ_CHUNK), b""):
            h.update(chunk)
    return h.hexdigest()


def files_identical(path_a, path_b):
    return file_hash(path_a) == file_hash(path_b)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 2:
        print(USAGE)
        return 0

    first, second = argv
    hash_first = file_hash(first)
    hash_second = file_hash(second)

    print(f"{first}: {hash_first}")
    print(f"{second}: {hash_second}")

    if hash_first == hash_second:
        print("[SUCCESS] Files are identical")
        return 0
    print("[ERROR] Files are different")
    return 1


# MAIN
if __name__ == "__main__":
    sys.exit(main())
