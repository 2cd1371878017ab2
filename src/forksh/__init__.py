""" A minimal fork/exec shell: sequencing, pipes and redirection. """
