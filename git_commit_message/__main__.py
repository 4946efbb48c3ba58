from git_commit_message.cli.main import run

if __name__ == "__main__":
    run()
